"""In-memory store of logo generation jobs."""

from __future__ import annotations

from typing import Optional

from brandmark.pipeline.models import GenerationJob


class JobStore:
    """Thread-safe (GIL) dict of job_id → GenerationJob."""

    def __init__(self) -> None:
        self._jobs: dict[str, GenerationJob] = {}

    def create(self, job: GenerationJob) -> None:
        self._jobs[job.job_id] = job

    def get(self, job_id: str) -> Optional[GenerationJob]:
        return self._jobs.get(job_id)

    def list_all(self, user_id: Optional[str] = None) -> list[GenerationJob]:
        jobs = [
            j for j in self._jobs.values()
            if user_id is None or j.user_id == user_id
        ]
        return sorted(jobs, key=lambda j: j.created_at, reverse=True)


# Singleton
job_store = JobStore()
