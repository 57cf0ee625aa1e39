"""Tests for current project resolution."""

from oc_projects.domains.projects.context import get_context_nickname, resolve_context
from oc_projects.domains.projects.models import SessionConfig, SessionContext


class TestGetContextNickname:
    """Test generated context nicknames."""

    def test_strips_cluster_from_user(self) -> None:
        nickname = get_context_nickname("dev", "api-example-com:6443", "alice/api-example-com:6443")
        assert nickname == "dev/api-example-com:6443/alice"

    def test_plain_user(self) -> None:
        assert get_context_nickname("dev", "local", "admin") == "dev/local/admin"

    def test_deterministic(self) -> None:
        assert get_context_nickname("a", "b", "c/d") == get_context_nickname("a", "b", "c/e")


class TestResolveContext:
    """Test resolve_context."""

    def test_no_session(self) -> None:
        resolved = resolve_context(None)
        assert resolved.current_project == ""
        assert resolved.context_name == ""
        assert resolved.nickname == ""

    def test_current_context_missing_from_table(self) -> None:
        session = SessionConfig(current_context="missing", contexts={})

        resolved = resolve_context(session)

        assert resolved.current_project == ""
        assert resolved.context_name == "missing"

    def test_active_context(self) -> None:
        context = SessionContext(
            name="dev/api-example-com:6443/alice",
            namespace="dev",
            cluster="api-example-com:6443",
            auth_info="alice/api-example-com:6443",
        )
        session = SessionConfig(current_context=context.name, contexts={context.name: context})

        resolved = resolve_context(session)

        assert resolved.current_project == "dev"
        assert resolved.context_name == context.name
        assert resolved.nickname == context.name

    def test_user_named_context(self) -> None:
        context = SessionContext(name="work", namespace="dev", cluster="prod", auth_info="alice")
        session = SessionConfig(current_context="work", contexts={"work": context})

        resolved = resolve_context(session)

        assert resolved.context_name == "work"
        assert resolved.nickname == "dev/prod/alice"

    def test_context_without_namespace(self) -> None:
        context = SessionContext(name="work", cluster="prod", auth_info="alice")
        session = SessionConfig(current_context="work", contexts={"work": context})

        assert resolve_context(session).current_project == ""
