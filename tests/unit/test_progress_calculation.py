# -*- coding: utf-8 -*-
"""
Unit тесты для расчета прогресса
"""

import pytest

from tora.domain.enums import ItemStatus
from tora.domain.models import Item, Section
from tora.service.progress import (compute_curriculum_progress,
                                   compute_section_progress, percent_of)

C = ItemStatus.COMPLETED
P = ItemStatus.IN_PROGRESS
N = ItemStatus.NOT_STARTED


def _items(*statuses):
    return [Item(title=f"Item {i}", status=s) for i, s in enumerate(statuses)]


class TestPercentOf:
    """Тесты округления процента"""

    @pytest.mark.parametrize(
        "completed,total,expected",
        [
            (0, 0, 0),
            (0, 5, 0),
            (1, 3, 33),
            (2, 3, 67),
            (1, 2, 50),
            (1, 8, 13),
            (5, 8, 63),
            (3, 3, 100),
        ],
    )
    def test_rounds_half_up(self, completed, total, expected):
        """Процент округляется до целого, половина вверх"""
        assert percent_of(completed, total) == expected


class TestSectionProgress:
    """Тесты прогресса раздела"""

    def test_empty_section_is_zero(self):
        """Пустой раздел имеет прогресс 0"""
        assert compute_section_progress([]) == 0

    def test_one_of_three_completed(self):
        """Одно выполненное задание из трех дает 33"""
        assert compute_section_progress(_items(C, N, P)) == 33

    def test_in_progress_is_not_completed(self):
        """Задания в работе не считаются выполненными"""
        assert compute_section_progress(_items(P, P)) == 0

    def test_all_completed(self):
        """Все задания выполнены"""
        assert compute_section_progress(_items(C, C, C, C)) == 100


class TestCurriculumProgress:
    """Тесты прогресса учебной программы"""

    def test_empty_curriculum(self):
        """Программа без разделов и заданий"""
        # Act
        progress = compute_curriculum_progress([])

        # Assert
        assert progress.total_items == 0
        assert progress.completed_items == 0
        assert progress.percent == 0

    def test_sections_without_items(self):
        """Разделы без заданий не влияют на итог"""
        sections = [(Section(title="A"), []), (Section(title="B"), [])]

        progress = compute_curriculum_progress(sections)

        assert progress.total_items == 0
        assert progress.percent == 0

    def test_counts_over_flattened_items(self):
        """Процент считается по всем заданиям, а не как среднее разделов"""
        # Arrange: раздел A 1/1, раздел B 0/9
        sections = [
            (Section(title="A"), _items(C)),
            (Section(title="B"), _items(*([N] * 9))),
        ]

        # Act
        progress = compute_curriculum_progress(sections)

        # Assert
        assert progress.total_items == 10
        assert progress.completed_items == 1
        assert progress.percent == 10

    def test_mixed_statuses(self):
        """Смешанные статусы в нескольких разделах"""
        sections = [
            (Section(title="A"), _items(C, P, N)),
            (Section(title="B"), _items(C, C)),
            (Section(title="C"), _items(N, N, N)),
        ]

        progress = compute_curriculum_progress(sections)

        assert progress.total_items == 8
        assert progress.completed_items == 3
        assert progress.percent == 38
