"""Common Pydantic models shared across cluster resources."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ResourceMetadata(BaseModel):
    """Common metadata for Kubernetes resources."""

    name: str = Field(..., description="Resource name")
    uid: str | None = Field(None, description="Kubernetes UID")
    kind: str | None = Field(None, description="Resource kind")
    api_version: str | None = Field(None, description="API version")
    creation_timestamp: datetime | None = Field(None, description="When the resource was created")
    labels: dict[str, str] = Field(default_factory=dict, description="Resource labels")
    annotations: dict[str, str] = Field(default_factory=dict, description="Resource annotations")

    @classmethod
    def from_k8s_metadata(
        cls,
        metadata: Any,
        kind: str | None = None,
        api_version: str | None = None,
    ) -> "ResourceMetadata":
        """Create from a Kubernetes metadata object or a raw metadata dict.

        Typed core API objects (V1ObjectMeta) expose snake_case attributes,
        while custom object responses are plain dicts with camelCase keys.

        Args:
            metadata: Kubernetes metadata object or dict.
            kind: Resource kind (e.g., "Project", "Namespace").
            api_version: API version (e.g., "project.openshift.io/v1").
        """
        if isinstance(metadata, dict):
            return cls(
                name=metadata["name"],
                uid=metadata.get("uid"),
                kind=kind,
                api_version=api_version,
                creation_timestamp=metadata.get("creationTimestamp"),
                labels=dict(metadata.get("labels") or {}),
                annotations=dict(metadata.get("annotations") or {}),
            )

        # Convert labels/annotations to plain dicts if they're ResourceField objects
        labels = metadata.labels
        if labels is not None and not isinstance(labels, dict):
            labels = dict(labels)
        annotations = metadata.annotations
        if annotations is not None and not isinstance(annotations, dict):
            annotations = dict(annotations)

        return cls(
            name=metadata.name,
            uid=getattr(metadata, "uid", None),
            kind=kind,
            api_version=api_version,
            creation_timestamp=getattr(metadata, "creation_timestamp", None),
            labels=labels or {},
            annotations=annotations or {},
        )
