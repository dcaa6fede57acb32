"""Pytest configuration and fixtures for TSC Baseline tests."""

import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest


BASIC_TS_ERROR_OUTPUT = """yarn run v1.22.22
$ tsc
src/util.ts(134,7): error TS2322: Type 'number' is not assignable to type 'string'.
info Visit https://yarnpkg.com/en/docs/cli/run for documentation about this command."""

NOISY_ERROR_LOG = """warning package.json: License should be a valid SPDX license expression
error Command failed with exit code 2.
yarn run v1.22.19
$ /Users/dev/workspace/tsc-baseline/node_modules/.bin/tsc
src/util.ts(35,7): error TS1005: ',' expected.
src/util.ts(35,12): error TS1389: 'if' is not allowed as a variable declaration name.
src/util.ts(40,3): error TS1128: Declaration or statement expected.
src/util.ts(43,1): error TS1128: Declaration or statement expected.
src/util.ts(81,1): error TS1128: Declaration or statement expected.
src/somethingElse.ts(2,1): error TS1128: Declaration or statement expected.
info Visit https://yarnpkg.com/en/docs/cli/run for documentation about this command."""


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp(prefix="tscbaseline_test_"))
    try:
        yield temp_path
    finally:
        if temp_path.exists():
            shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def baseline_path(temp_dir: Path) -> Path:
    """Location of a baseline file inside the temporary directory."""
    return temp_dir / ".tsc-baseline.json"


@pytest.fixture
def basic_output() -> str:
    """Compiler output with a single error wrapped in runner noise."""
    return BASIC_TS_ERROR_OUTPUT


@pytest.fixture
def noisy_log() -> str:
    """Compiler output with repeated errors across two files."""
    return NOISY_ERROR_LOG
