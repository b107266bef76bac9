"""FastAPI server exposing the quiz session to a browser page."""

from __future__ import annotations

from pathlib import Path
from threading import Thread
from typing import Literal

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, Field
import uvicorn

from study_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from study_quiz.core.models import QuizMode
from study_quiz.core.prompt_renderer import renderer
from study_quiz.core.quiz_manager import QuizManager, SessionSnapshot
from study_quiz.core.services.scoreboard import format_elapsed
from study_quiz.server.student_page import STUDENT_PAGE_HTML


class ModePayload(BaseModel):
    """Payload schema for starting a quiz."""

    type: Literal["all", "module", "subject", "random", "custom"]
    module_number: int | None = None
    subject_name: str | None = None
    selected_question_ids: list[str] | None = None
    randomize_answers: bool = False


class OptionPayload(BaseModel):
    """Payload schema for selecting or submitting an option (original index)."""

    option_index: int | None = None


class SelectionPayload(BaseModel):
    """Payload schema for replacing the custom selection."""

    selected_question_ids: list[str] = Field(default_factory=list)


class TogglePayload(BaseModel):
    question_id: str


def _get_quiz_manager_dependency(quiz_manager: QuizManager):
    def dependency() -> QuizManager:
        return quiz_manager

    return dependency


def _mode_from_payload(payload: ModePayload, manager: QuizManager) -> QuizMode:
    if payload.type == "all":
        return QuizMode.all_questions(payload.randomize_answers)
    if payload.type == "random":
        return QuizMode.random_sample(payload.randomize_answers)
    if payload.type == "module":
        if payload.module_number is None:
            raise HTTPException(status_code=422, detail="module_number is required for a module quiz.")
        return QuizMode.module(payload.module_number, payload.randomize_answers)
    if payload.type == "subject":
        if not payload.subject_name:
            raise HTTPException(status_code=422, detail="subject_name is required for a subject quiz.")
        return QuizMode.subject(payload.subject_name, payload.randomize_answers)
    selected = payload.selected_question_ids
    if selected is None:
        selected = manager.get_custom_selection()
    return QuizMode.custom(selected, payload.randomize_answers)


def serialize_snapshot(snapshot: SessionSnapshot) -> dict[str, object]:
    """Turn a snapshot into the JSON document polled by the browser page."""
    status = snapshot.state.name.lower() if snapshot.state else "idle"
    payload: dict[str, object] = {
        "status": status,
        "phase": snapshot.phase.name.lower() if snapshot.phase else None,
        "mode": snapshot.mode.kind.name.lower() if snapshot.mode else None,
        "randomize_answers": snapshot.mode.randomize_answers if snapshot.mode else False,
        "question": None,
        "selected_option_index": snapshot.selected_option_index,
        "feedback": None,
        "position": snapshot.position,
        "total": snapshot.total,
        "progress_fraction": snapshot.progress_fraction,
        "is_last_question": snapshot.is_last_question,
        "correct_count": snapshot.correct_count,
        "attempt_count": snapshot.attempt_count,
        "score_percentage": snapshot.score_percentage,
        "elapsed_seconds": snapshot.elapsed_seconds,
        "elapsed_display": format_elapsed(snapshot.elapsed_seconds),
    }

    question = snapshot.question
    if question is not None:
        payload["question"] = {
            "question_html": renderer.render_fragment(question.question_text),
            "image": question.image_path,
            "options": [
                {
                    "original_index": choice.original_index,
                    "text": choice.text,
                    "html": renderer.render_fragment(choice.text),
                }
                for choice in snapshot.answer_order
            ],
        }

    # Only reveal the correct answer once the current question is graded
    result = snapshot.last_result
    if result is not None:
        payload["feedback"] = {
            "is_correct": result.is_correct,
            "selected_option_index": result.selected_option_index,
            "correct_option_index": result.question.correct_option_index,
        }
    return payload


def create_api_app(quiz_manager: QuizManager, image_root: Path | None = None) -> FastAPI:
    """Create a FastAPI application wired to the provided quiz manager.

    When ``image_root`` is given, question images are served under ``/images``.
    """
    app = FastAPI(title="StudyQuiz API", version="0.2.0")
    if image_root is not None and image_root.is_dir():
        app.mount("/images", StaticFiles(directory=image_root), name="images")
    quiz_manager_dep = _get_quiz_manager_dependency(quiz_manager)

    @app.get("/", response_class=HTMLResponse)
    def serve_student_page() -> str:
        return STUDENT_PAGE_HTML

    @app.get("/catalog")
    def get_catalog(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        return {
            "modules": [
                {
                    "number": module.number,
                    "name": module.name,
                    "subjects": [
                        {"name": subject.name, "display_name": subject.display_name}
                        for subject in module.subjects
                    ],
                }
                for module in manager.catalog.get_modules()
            ],
            "custom_selection_size": len(manager.get_custom_selection()),
        }

    @app.get("/state")
    def get_state(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        manager.tick()
        return serialize_snapshot(manager.get_snapshot())

    @app.post("/session", status_code=201)
    async def start_session(
        payload: ModePayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        mode = _mode_from_payload(payload, manager)
        await manager.start_session(mode)
        return serialize_snapshot(manager.get_snapshot())

    @app.delete("/session")
    def leave_session(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        manager.back_to_mode_selection()
        return serialize_snapshot(manager.get_snapshot())

    @app.post("/session/select")
    def select_answer(
        payload: OptionPayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        if payload.option_index is None or not manager.select_answer(payload.option_index):
            raise HTTPException(status_code=409, detail="The option cannot be selected right now.")
        return serialize_snapshot(manager.get_snapshot())

    @app.post("/session/answer")
    def submit_answer(
        payload: OptionPayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        result = manager.submit_answer(payload.option_index)
        if result is None:
            raise HTTPException(status_code=409, detail="No answer can be submitted right now.")
        return serialize_snapshot(manager.get_snapshot())

    @app.post("/session/continue")
    def continue_to_next(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        if not manager.continue_to_next():
            raise HTTPException(status_code=409, detail="Submit an answer before continuing.")
        return serialize_snapshot(manager.get_snapshot())

    @app.get("/questions")
    async def list_questions(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        pool = await manager.get_question_pool()
        selected = set(manager.get_custom_selection())
        return {
            "questions": [
                {
                    "question_id": question.question_id,
                    "question_text": question.question_text,
                    "option_count": len(question.options),
                    "selected": question.question_id in selected,
                }
                for question in pool
            ]
        }

    @app.get("/selection")
    def get_selection(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        return {"selected_question_ids": manager.get_custom_selection()}

    @app.put("/selection")
    def replace_selection(
        payload: SelectionPayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        return {"selected_question_ids": manager.set_custom_selection(payload.selected_question_ids)}

    @app.post("/selection/toggle")
    def toggle_selection(
        payload: TogglePayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        selected = manager.toggle_custom_question(payload.question_id)
        return {"question_id": payload.question_id, "selected": selected}

    return app


def start_api_server(
    quiz_manager: QuizManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    image_root: Path | None = None,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(quiz_manager, image_root)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="QuizApiServer", daemon=True)
    thread.start()
    return thread
