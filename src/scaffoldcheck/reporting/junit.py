from __future__ import annotations

from pathlib import Path

from junitparser import Failure, JUnitXml, TestCase, TestSuite

from scaffoldcheck.metrics import RunResult


def write_junit(path: Path, result: RunResult) -> Path:
    """Write one testsuite per check routine and one testcase per assertion."""
    xml = JUnitXml()

    for section in result.sections:
        suite = TestSuite(section.name)
        suite.add_property("port", str(result.port))
        for warning in section.warnings:
            suite.add_property("warning", warning)

        for assertion in section.assertions:
            case = TestCase(assertion.name)
            case.classname = section.name
            if not assertion.passed:
                case.result = [Failure(assertion.message)]
            suite.add_testcase(case)

        # Use append (not +=) to preserve properties
        xml.append(suite)

    path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(path), pretty=True)
    return path
