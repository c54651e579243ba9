"""In-process project store. Lost on restart."""

import itertools
import threading
from typing import List

from .. import schemas
from ..exceptions import ProjectNotFound
from .base import ProjectStore


class InMemoryProjectStore(ProjectStore):
    """Keeps private copies; callers never hold the stored instance."""

    def __init__(self, calculator=None):
        super().__init__(calculator)
        self._lock = threading.Lock()
        self._projects = {}  # id -> (seq, Project)
        self._seq = itertools.count()

    def _insert(self, project: schemas.Project) -> schemas.Project:
        stored = project.model_copy(deep=True)
        with self._lock:
            if stored.id in self._projects:
                raise ValueError(f"Duplicate project id: {stored.id}")
            self._projects[stored.id] = (next(self._seq), stored)
        return stored.model_copy(deep=True)

    def list(self) -> List[schemas.Project]:
        with self._lock:
            entries = list(self._projects.values())
        entries.sort(key=lambda e: (e[1].created_at, e[0]), reverse=True)
        return [project.model_copy(deep=True) for _, project in entries]

    def get(self, project_id: str) -> schemas.Project:
        with self._lock:
            entry = self._projects.get(project_id)
        if entry is None:
            raise ProjectNotFound(project_id)
        return entry[1].model_copy(deep=True)
