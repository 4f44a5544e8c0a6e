from __future__ import annotations

from src.dance_attendance.dance_attendance.common.collation import polish_sort_key


def test_polish_letters_follow_their_base_letter():
    names = ["Zając", "Łukasz", "Lis", "Mazur", "Źrebiec", "Żak", "Ćwik", "Cieślak", "Dąb"]

    assert sorted(names, key=polish_sort_key) == [
        "Cieślak",
        "Ćwik",
        "Dąb",
        "Lis",
        "Łukasz",
        "Mazur",
        "Zając",
        "Źrebiec",
        "Żak",
    ]


def test_ordering_ignores_case():
    assert sorted(["nowak", "Kowalska", "ANNA"], key=polish_sort_key) == ["ANNA", "Kowalska", "nowak"]


def test_shorter_prefix_sorts_first():
    assert sorted(["Anna Maria", "Anna"], key=polish_sort_key) == ["Anna", "Anna Maria"]
