# -*- coding: utf-8 -*-
from .models import StudyGoal, TaskRecord


# In-memory storage for study goals and tasks
# In a real application, this would be replaced with a persistent database

BATCH_SIZE = 500

goals: list[StudyGoal] = []
tasks: list[TaskRecord] = []


def add_goal(goal: StudyGoal) -> None:
    """Adds a study goal.

    :param goal: The StudyGoal to store.
    """
    goals.append(goal)


def add_tasks(new_tasks: list[TaskRecord]) -> int:
    """Adds tasks in batches of ``BATCH_SIZE``.

    :param new_tasks: The TaskRecord objects to store.
    :return: The number of tasks stored.
    """
    inserted = 0
    for i in range(0, len(new_tasks), BATCH_SIZE):
        batch = new_tasks[i:i + BATCH_SIZE]
        tasks.extend(batch)
        inserted += len(batch)
    return inserted


def clear() -> None:
    """Removes every stored goal and task."""
    goals.clear()
    tasks.clear()
