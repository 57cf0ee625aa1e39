"""Annotation keys read from OpenShift projects."""


class OpenShiftAnnotations:
    """Well-known OpenShift annotation keys."""

    DISPLAY_NAME = "openshift.io/display-name"

    # Older projects carried their display name under this key
    LEGACY_DISPLAY_NAME = "displayName"

    @classmethod
    def display_name(cls, annotations: dict[str, str] | None) -> str | None:
        """Return the display name, preferring the openshift.io key over the legacy one."""
        annotations = annotations or {}
        return annotations.get(cls.DISPLAY_NAME) or annotations.get(cls.LEGACY_DISPLAY_NAME) or None
