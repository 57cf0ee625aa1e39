"""Display the current OpenShift project and the projects you can access."""

__version__ = "0.1.0"
