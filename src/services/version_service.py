"""Versioned project data access backed by the HTTP API and a TTL cache.

Architecture:
    Results view -> VersionService -> ApiClient -> project/version API
                                   -> TTLCache (resource + params keys)

Reads go through the cache; writes invalidate every key under the
``versions`` prefix and the affected project entry, since both the version
lists and the project's current version change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from config.app_config import AppConfig
from processing.performance import ResultsDataset, load_results_dataset
from utils.error_handling import TimingContext

from .api_client import ApiClient
from .cache import TTLCache, cache_key
from .version_models import (
    CreateVersionRequest,
    PagedResponse,
    ProjectDetail,
    ProjectVersion,
    VersionSummary,
)

logger = logging.getLogger(__name__)


@dataclass
class VersionResults:
    """Result rows of one version plus whether it is the project's current one."""

    project_id: str
    version_number: int
    dataset: ResultsDataset
    is_current_version: bool


class VersionService:
    """Fetches and caches projects, versions and version results."""

    def __init__(
        self,
        api: ApiClient,
        cache: Optional[TTLCache] = None,
        config: Optional[AppConfig] = None,
    ) -> None:
        self.api = api
        self.cache = cache if cache is not None else TTLCache()
        self.config = config or api.config

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_project(self, project_id: str) -> ProjectDetail:
        key = cache_key("project", project_id)
        return self.cache.get_or_set(
            key,
            lambda: ProjectDetail.from_payload(self.api.get(f"/api/projects/{project_id}")),
            self.config.ttl_for("project"),
        )

    def get_versions(
        self,
        page_number: int = 1,
        page_size: Optional[int] = None,
        user_id: Optional[str] = None,
        project_id: Optional[str] = None,
        sort_by: Optional[str] = None,
        sort_descending: Optional[bool] = None,
    ) -> PagedResponse[VersionSummary]:
        params = {
            "pageNumber": page_number,
            "pageSize": page_size or self.config.default_page_size,
            "userId": user_id,
            "projectId": project_id,
            "sortBy": sort_by,
            "sortDescending": sort_descending,
        }
        key = cache_key("versions", None, params)
        return self.cache.get_or_set(
            key,
            lambda: PagedResponse.from_payload(
                self.api.get("/api/versions", params=params), VersionSummary.from_payload
            ),
            self.config.ttl_for("versions"),
        )

    def get_project_versions(
        self,
        project_id: str,
        page_number: int = 1,
        page_size: Optional[int] = None,
        sort_by: Optional[str] = None,
        sort_descending: Optional[bool] = None,
    ) -> PagedResponse[VersionSummary]:
        params = {
            "pageNumber": page_number,
            "pageSize": page_size or self.config.default_page_size,
            "sortBy": sort_by,
            "sortDescending": sort_descending,
        }
        key = cache_key("versions:project", project_id, params)
        return self.cache.get_or_set(
            key,
            lambda: PagedResponse.from_payload(
                self.api.get(f"/api/versions/project/{project_id}", params=params),
                VersionSummary.from_payload,
            ),
            self.config.ttl_for("versions:project"),
        )

    def get_version(self, project_id: str, version_number: int) -> ProjectVersion:
        key = cache_key("version", f"{project_id}:{version_number}")
        return self.cache.get_or_set(
            key,
            lambda: ProjectVersion.from_payload(self.api.get(f"/api/versions/{project_id}/{version_number}")),
            self.config.ttl_for("version"),
        )

    def get_results_dataset(self, project_id: str, version_number: int) -> ResultsDataset:
        """Return the result rows stored with a version (empty if it has none)."""
        with TimingContext(f"results_dataset:{project_id}:{version_number}"):
            version = self.get_version(project_id, version_number)
            dataset = load_results_dataset(version.results_data)
        logger.info(
            "Loaded %d result rows for version %s",
            len(dataset),
            version_number,
            extra={"event": "version.results_loaded", "project_id": project_id},
        )
        return dataset

    def load_version_results(self, project_id: str, version_number: int) -> VersionResults:
        """Results of a version flagged against the project's current version."""
        dataset = self.get_results_dataset(project_id, version_number)
        project = self.get_project(project_id)
        return VersionResults(
            project_id=project_id,
            version_number=version_number,
            dataset=dataset,
            is_current_version=project.current_version == version_number,
        )

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create_version(self, request: CreateVersionRequest) -> ProjectVersion:
        payload = self.api.post("/api/versions", json=request.to_payload())
        self._invalidate_project(request.project_id)
        version = ProjectVersion.from_payload(payload)
        logger.info(
            "Created version %s",
            version.version_number,
            extra={"event": "version.created", "project_id": request.project_id},
        )
        return version

    def set_current_version(self, project_id: str, version_number: int) -> None:
        self.api.post(f"/api/versions/{project_id}/{version_number}/setcurrent")
        self._invalidate_project(project_id)
        logger.info(
            "Set current version to %s",
            version_number,
            extra={"event": "version.set_current", "project_id": project_id},
        )

    def _invalidate_project(self, project_id: str) -> None:
        self.cache.remove_by_prefix(cache_key("versions:project", project_id))
        self.cache.remove_by_prefix("versions")
        self.cache.remove(cache_key("project", project_id))
