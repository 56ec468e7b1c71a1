"""In-memory, ordered collection of tasks."""

from typing import Iterable, Iterator, List, Optional

from .task import Task


class TaskList:
    """Owns the tasks Eve is tracking. Indexes here are 0-based."""

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def as_list(self) -> List[Task]:
        """A snapshot copy of the tasks, in order."""
        return list(self._tasks)

    def add(self, task: Task) -> Task:
        self._tasks.append(task)
        return task

    def delete_at(self, index: int) -> Task:
        return self._tasks.pop(index)

    def set_done(self, index: int, done: bool) -> Task:
        task = self._tasks[index]
        if done:
            task.mark_done()
        else:
            task.mark_not_done()
        return task

    def find(self, keyword: str) -> List[Task]:
        """Tasks whose description contains ``keyword``, case-insensitively."""
        return [task for task in self._tasks if task.matches(keyword)]
