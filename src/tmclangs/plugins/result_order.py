"""Alignment of parsed test results with scan-time ordering."""

from typing import Iterable, List

from ..domain import ExerciseDesc, TestResult

MISSING_RESULT_MESSAGE = "No result reported"


def missing_result(name: str, points=()) -> TestResult:
    """Placeholder for a scanned test the executor never reported on."""
    return TestResult(
        name=name,
        successful=False,
        message=MISSING_RESULT_MESSAGE,
        points=tuple(points),
        error=True,
    )


def order_by_exercise(results: Iterable[TestResult], exercise: ExerciseDesc) -> List[TestResult]:
    """Reorder results so they follow the exercise's scan order.

    Every scanned test gets exactly one result, in scan order. Tests missing
    from the artifact (the executor crashed or stopped early) get an errored
    placeholder, so an empty artifact can never pass. Results for tests the
    scan did not see, and repeated results for one test, keep their artifact
    order after those.
    """
    results = list(results)
    by_name = {}
    unknown = []
    scanned = set(exercise.test_names())

    for result in results:
        if result.name in scanned and result.name not in by_name:
            by_name[result.name] = result
        else:
            unknown.append(result)

    ordered = [by_name.get(test.name) or missing_result(test.name, test.points) for test in exercise.tests]
    return ordered + unknown
