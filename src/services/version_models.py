"""Transfer objects for project and version API payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, TypeVar

T = TypeVar("T")

JsonObject = Dict[str, Any]


@dataclass
class ProjectDetail:
    """Project metadata including the version number marked current."""
    id: str
    project_name: str
    modelling_type: Optional[str] = None
    created_by: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    current_version: Optional[int] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ProjectDetail":
        return cls(
            id=str(payload["id"]),
            project_name=payload.get("projectName", ""),
            modelling_type=payload.get("modellingType"),
            created_by=payload.get("createdBy"),
            created_at=payload.get("createdAt"),
            updated_at=payload.get("updatedAt"),
            current_version=payload.get("currentVersion"),
        )


@dataclass
class VersionSummary:
    id: str
    project_id: str
    version_number: int
    created_at: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "VersionSummary":
        return cls(
            id=str(payload["id"]),
            project_id=str(payload["projectId"]),
            version_number=int(payload["versionNumber"]),
            created_at=payload.get("createdAt"),
        )


@dataclass
class ProjectVersion:
    """A project version with all of its uploaded data blobs."""
    id: str
    project_id: str
    version_number: int
    project_data: JsonObject = field(default_factory=dict)
    model_info_data: Optional[JsonObject] = None
    dot_model_data: Optional[JsonObject] = None
    model_input_data: Optional[JsonObject] = None
    results_data: Optional[Any] = None
    created_at: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ProjectVersion":
        return cls(
            id=str(payload["id"]),
            project_id=str(payload["projectId"]),
            version_number=int(payload["versionNumber"]),
            project_data=payload.get("projectData") or {},
            model_info_data=payload.get("modelInfoData"),
            dot_model_data=payload.get("dotModelData"),
            model_input_data=payload.get("modelInputData"),
            results_data=payload.get("resultsData"),
            created_at=payload.get("createdAt"),
        )


@dataclass
class CreateVersionRequest:
    project_id: str
    project_data: JsonObject
    model_info_data: Optional[JsonObject] = None
    dot_model_data: Optional[JsonObject] = None
    model_input_data: Optional[JsonObject] = None
    results_data: Optional[Any] = None

    def to_payload(self) -> JsonObject:
        payload: JsonObject = {
            "projectId": self.project_id,
            "projectData": self.project_data,
            "modelInfoData": self.model_info_data,
            "dotModelData": self.dot_model_data,
            "modelInputData": self.model_input_data,
            "resultsData": self.results_data,
        }
        return {key: value for key, value in payload.items() if value is not None}


@dataclass
class PagedResponse(Generic[T]):
    items: List[T]
    page_number: int = 1
    page_size: int = 10
    total_count: int = 0
    total_pages: int = 0
    has_next_page: bool = False
    has_previous_page: bool = False

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any], item_factory: Callable[[Mapping[str, Any]], T]) -> "PagedResponse[T]":
        return cls(
            items=[item_factory(item) for item in payload.get("items") or []],
            page_number=payload.get("pageNumber", 1),
            page_size=payload.get("pageSize", 10),
            total_count=payload.get("totalCount", 0),
            total_pages=payload.get("totalPages", 0),
            has_next_page=payload.get("hasNextPage", False),
            has_previous_page=payload.get("hasPreviousPage", False),
        )
