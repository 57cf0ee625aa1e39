"""Domain modules for oc-projects."""
