"""Static subject and module catalog.

Each entry is ``(storage_name, display_name, module_number)``. The order of
the entries is the order in which questions are concatenated for the
"all questions" and per-module quizzes.
"""

SUBJECT_DEFINITIONS: tuple[tuple[str, str, int], ...] = (
    # Module 1
    ("fundamentele_programarii", "Fundamentele Programării", 1),
    ("programare_in_python", "Programare în Python", 1),
    ("programare_orientata_obiect", "Programare Orientată pe Obiecte (C++)", 1),
    ("metode_avansate_programare_java", "Metode Avansate de Programare (Java)", 1),
    ("tehnici_avansate_programare", "Tehnici Avansate de Programare", 1),
    ("algoritmi_si_structuri_de_date", "Algoritmi și Structuri de Date", 1),
    # Module 2
    ("modul_2_baze_de_date", "Baze de Date", 2),
    ("modul_2_sisteme_de_gestiune_a_bazelor_de_date", "Sisteme de Gestiune a Bazelor de Date", 2),
    # Module 3
    ("modul_3_sisteme_de_operare", "Sisteme de Operare", 3),
    ("modul_3_retele_de_calculatoare", "Rețele de Calculatoare", 3),
    ("modul_3_administrare_retele_de_calculatoare", "Administrarea Rețelelor de Calculatoare", 3),
    ("modul_3_criptografie", "Criptografie", 3),
    # Module 4
    ("modul_4_tehnologii_web", "Tehnologii Web", 4),
    ("modul_4_comert_electronic", "Comerț Electronic", 4),
    ("modul_4_cloud_computing", "Cloud Computing", 4),
    ("modul_4_inovare_si_transformare_digitala", "Inovare și Transformare Digitală", 4),
)

MODULE_NAMES: dict[int, str] = {
    1: "Programare și Algoritmi",
    2: "Baze de Date",
    3: "Sisteme și Rețele",
    4: "Tehnologii Moderne",
}
