from __future__ import annotations

from release_issues.test.architecture._utils import find_offenders, package_root


def test_direct_rich_imports_are_limited_to_console() -> None:
    offenders = find_offenders(
        package_root(), ("rich",), allow=frozenset({"output/console.py"})
    )
    assert not offenders, "Direct rich usage policy violations:\n" + "\n".join(offenders)


def test_gitlab_client_libraries_are_confined_to_adapter() -> None:
    offenders = find_offenders(
        package_root(), ("gitlab", "requests"), allow=frozenset({"services/gitlab.py"})
    )
    assert not offenders, "GitLab library usage outside adapter:\n" + "\n".join(offenders)
