"""Map changed paths to the run mode they should trigger."""

from collections.abc import Sequence
from pathlib import PurePath

from maven_watch.models.mode import CompileOnly, FullRun, RunMode, TargetedTests

RUN_ALL_KEYWORD = "all"
COMPILE_KEYWORD = "compile"
JVM_SOURCE_SUFFIXES = frozenset({".java", ".kt", ".groovy", ".scala"})


def derive_test_id(path: str) -> str | None:
    """Derive the test identifier a changed path stands for.

    Bare identifiers (no directory, no source suffix) pass through. A JVM
    source file maps to its class name; main sources map to their ``Test``
    companion (``src/main/java/com/x/Foo.java`` -> ``FooTest``).

    Returns:
        The identifier, or None for paths that do not map to a test

    """
    stripped = path.strip()
    if not stripped:
        return None

    pure = PurePath(stripped)
    if pure.suffix not in JVM_SOURCE_SUFFIXES:
        # "FooTest", "FooTest#testBar" or "com.x.FooTest", but not "pom.xml"
        is_identifier = len(pure.parts) == 1 and (
            not pure.suffix or pure.suffix[1].isupper()
        )
        return stripped if is_identifier else None

    if "test" in pure.parts[:-1] or pure.stem.endswith(("Test", "Tests", "IT")):
        return pure.stem
    return f"{pure.stem}Test"


def resolve_mode(paths: Sequence[str]) -> RunMode | None:
    """Choose the run mode for a set of changed paths.

    ``all`` anywhere in the paths requests a full run, ``compile`` a
    compile-only run; otherwise the tests for the paths are targeted.

    Returns:
        The mode to run, or None when nothing should run

    """
    if RUN_ALL_KEYWORD in paths:
        return FullRun()
    if COMPILE_KEYWORD in paths:
        return CompileOnly()

    test_ids = [test_id for path in paths if (test_id := derive_test_id(path))]
    if not test_ids:
        return None
    return TargetedTests(test_ids=tuple(dict.fromkeys(test_ids)))
