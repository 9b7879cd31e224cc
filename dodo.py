"""Development tasks. Run `doit list` to see all of them."""
from pathlib import Path

DOIT_CONFIG = {"default_tasks": ["format", "lint", "test"], "backend": "json"}

ROOT = Path(__file__).parent


def task_format():
    """Format the package, the tests and this file with black."""
    return {"actions": [["black", ROOT / "imutrack", ROOT / "tests", ROOT / "dodo.py"]], "verbosity": 1}


def task_lint():
    """Run prospector on the package."""
    return {"actions": [["prospector", ROOT / "imutrack"]], "verbosity": 1}


def task_test():
    """Run the test suite and report the coverage of the package."""
    return {"actions": [["pytest", "--cov=imutrack", "--cov-report=term-missing"]], "verbosity": 2}
