"""Single-page browser front end served at ``/``."""

STUDENT_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>StudyQuiz</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>
      :root { font-family: 'Inter', system-ui, sans-serif; background: #f5f5f5; color: #1f2937; }
      body { margin: 0 auto; padding: 1.5rem; max-width: 800px; display: flex; flex-direction: column; gap: 1rem; }
      .card { background: #fff; border-radius: 0.5rem; padding: 1.5rem; box-shadow: 0 0.25rem 1rem rgba(0, 0, 0, 0.08); }
      .hidden { display: none; }
      button { border: none; border-radius: 0.4rem; padding: 0.7rem 1.2rem; font-size: 1rem; background: #1890ff; color: #fff; cursor: pointer; }
      button:disabled { opacity: 0.5; cursor: not-allowed; }
      button.secondary { background: #e5e7eb; color: #1f2937; }
      .row { display: flex; flex-wrap: wrap; gap: 0.5rem; }
      .pick { display: block; margin-bottom: 0.4rem; }
      .option { display: block; width: 100%; text-align: left; margin-bottom: 0.5rem; background: #fff; color: #111; border: 1px solid #d9d9d9; }
      .option.selected { border: 2px solid #1890ff; }
      .option.correct { border: 2px solid #52c41a; background: #f6ffed; }
      .option.wrong { border: 2px solid #ff4d4f; background: #fff1f0; }
      .progress-track { height: 0.5rem; background: #e5e7eb; border-radius: 999px; overflow: hidden; }
      #progress-fill { height: 100%; background: #1890ff; width: 0; }
      pre { white-space: pre-wrap; font-family: monospace; }
      img.question-image { max-width: 100%; border: 1px solid #d9d9d9; border-radius: 6px; }
    </style>
  </head>
  <body>
    <section class="card" id="modes-card">
      <h1>StudyQuiz</h1>
      <div class="row">
        <button data-mode="all">All questions</button>
        <button data-mode="random">36 random questions</button>
        <button data-mode="custom" id="custom-button">My selection</button>
        <button class="secondary" id="picker-button">Edit my selection</button>
      </div>
      <p><label><input type="checkbox" id="randomize" /> Randomize answer order</label></p>
      <div id="modules"></div>
    </section>
    <section class="card hidden" id="picker-card">
      <h2>My selection</h2>
      <p>Tick the questions to include in your custom quiz.</p>
      <div id="picker-list"></div>
      <button data-action="done-picking">Done</button>
    </section>
    <section class="card hidden" id="message-card">
      <p id="message-text"></p>
      <button class="secondary" data-action="back">Back to quiz selection</button>
    </section>
    <section class="card hidden" id="quiz-card">
      <div class="row" style="justify-content: space-between">
        <strong id="position-label"></strong>
        <span id="score-label"></span>
        <span id="timer-label"></span>
      </div>
      <div class="progress-track"><div id="progress-fill"></div></div>
      <div id="question-container"></div>
      <div id="options-container"></div>
      <p id="feedback"></p>
      <div class="row">
        <button id="submit-button">Submit answer</button>
        <button id="continue-button" class="hidden">Next question</button>
        <button class="secondary" data-action="back">Back</button>
      </div>
    </section>
    <section class="card hidden" id="results-card">
      <h2>Quiz complete!</h2>
      <p id="results-correct"></p>
      <p id="results-score"></p>
      <p id="results-time"></p>
      <button data-action="back">Back to quiz selection</button>
    </section>
    <script>
      const cards = ['modes-card', 'picker-card', 'message-card', 'quiz-card', 'results-card'];
      let timer = null;

      function show(cardId) {
        cards.forEach((id) => document.getElementById(id).classList.toggle('hidden', id !== cardId));
      }

      async function call(method, path, body) {
        const response = await fetch(path, {
          method,
          headers: { 'Content-Type': 'application/json' },
          body: body === undefined ? undefined : JSON.stringify(body),
        });
        if (!response.ok) { return null; }
        return response.json();
      }

      async function loadCatalog() {
        const catalog = await call('GET', '/catalog');
        const container = document.getElementById('modules');
        container.innerHTML = '';
        document.getElementById('custom-button').textContent = `My selection (${catalog.custom_selection_size})`;
        catalog.modules.forEach((module) => {
          const block = document.createElement('div');
          const title = document.createElement('h3');
          title.textContent = `Module ${module.number}: ${module.name}`;
          const start = document.createElement('button');
          start.textContent = 'Start full module';
          start.onclick = () => startQuiz({ type: 'module', module_number: module.number });
          const subjects = document.createElement('div');
          subjects.className = 'row';
          module.subjects.forEach((subject) => {
            const button = document.createElement('button');
            button.className = 'secondary';
            button.textContent = subject.display_name;
            button.onclick = () => startQuiz({ type: 'subject', subject_name: subject.name });
            subjects.appendChild(button);
          });
          block.append(title, start, subjects);
          container.appendChild(block);
        });
      }

      async function openPicker() {
        const pool = await call('GET', '/questions');
        const list = document.getElementById('picker-list');
        list.innerHTML = '';
        pool.questions.forEach((question) => {
          const label = document.createElement('label');
          label.className = 'pick';
          const box = document.createElement('input');
          box.type = 'checkbox';
          box.checked = question.selected;
          box.onchange = async () => {
            const result = await call('POST', '/selection/toggle', { question_id: question.question_id });
            if (result) { box.checked = result.selected; }
          };
          label.append(box, ` ${question.question_id}: ${question.question_text.split('\\n')[0]}`);
          list.appendChild(label);
        });
        show('picker-card');
      }

      async function startQuiz(mode) {
        mode.randomize_answers = document.getElementById('randomize').checked;
        document.getElementById('message-text').textContent = 'Loading questions…';
        show('message-card');
        render(await call('POST', '/session', mode));
      }

      function stopTimer() {
        if (timer !== null) { clearInterval(timer); timer = null; }
      }

      function startTimer() {
        if (timer === null) {
          timer = setInterval(async () => render(await call('GET', '/state')), 1000);
        }
      }

      function renderQuestion(state) {
        const question = state.question;
        document.getElementById('position-label').textContent = `Question ${state.position} of ${state.total}`;
        document.getElementById('score-label').textContent =
          state.mode === 'random' ? '' : `Correct: ${state.correct_count}/${state.attempt_count}`;
        document.getElementById('timer-label').textContent = state.elapsed_display;
        document.getElementById('progress-fill').style.width = `${state.progress_fraction * 100}%`;
        let html = question.question_html;
        if (question.image) { html += `<img class="question-image" src="/images/${question.image}" alt="Question image" />`; }
        document.getElementById('question-container').innerHTML = html;

        const feedback = state.feedback;
        const options = document.getElementById('options-container');
        options.innerHTML = '';
        question.options.forEach((option) => {
          const button = document.createElement('button');
          button.className = 'option';
          button.innerHTML = option.html;
          if (feedback) {
            button.disabled = true;
            if (option.original_index === feedback.correct_option_index) { button.classList.add('correct'); }
            else if (option.original_index === feedback.selected_option_index) { button.classList.add('wrong'); }
          } else if (option.original_index === state.selected_option_index) {
            button.classList.add('selected');
          }
          button.onclick = async () => render(await call('POST', '/session/select', { option_index: option.original_index }));
          options.appendChild(button);
        });

        document.getElementById('feedback').textContent = feedback ? (feedback.is_correct ? 'Correct!' : 'Wrong answer.') : '';
        const submit = document.getElementById('submit-button');
        const next = document.getElementById('continue-button');
        submit.classList.toggle('hidden', Boolean(feedback));
        submit.disabled = state.selected_option_index === null;
        next.classList.toggle('hidden', !feedback);
        next.textContent = state.is_last_question ? 'Finish quiz' : 'Next question';
      }

      function render(state) {
        if (!state) { return; }
        if (state.status === 'idle') { stopTimer(); show('modes-card'); loadCatalog(); return; }
        if (state.status === 'loading') { show('message-card'); return; }
        if (state.status === 'no_questions') {
          stopTimer();
          document.getElementById('message-text').textContent = 'No questions were found for this selection.';
          show('message-card');
          return;
        }
        if (state.status === 'completed') {
          stopTimer();
          document.getElementById('results-correct').textContent = `Correct answers: ${state.correct_count} / ${state.attempt_count}`;
          document.getElementById('results-score').textContent = `Score: ${state.score_percentage}%`;
          document.getElementById('results-time').textContent = `Total time: ${state.elapsed_display}`;
          show('results-card');
          return;
        }
        renderQuestion(state);
        show('quiz-card');
        startTimer();
      }

      document.querySelectorAll('[data-mode]').forEach((button) => {
        button.onclick = () => startQuiz({ type: button.dataset.mode });
      });
      document.querySelectorAll('[data-action="back"]').forEach((button) => {
        button.onclick = async () => render(await call('DELETE', '/session'));
      });
      document.getElementById('picker-button').onclick = openPicker;
      document.querySelector('[data-action="done-picking"]').onclick = () => { show('modes-card'); loadCatalog(); };
      document.getElementById('submit-button').onclick = async () => render(await call('POST', '/session/answer', {}));
      document.getElementById('continue-button').onclick = async () => render(await call('POST', '/session/continue'));

      call('GET', '/state').then(render);
    </script>
  </body>
</html>
"""
