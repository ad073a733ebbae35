"""Helper script to run pytest with coverage programmatically."""

import sys
from pathlib import Path
import coverage
import pytest

# Add project root to Python path to ensure modules are found
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

# Start coverage measurement
# We are interested in the library and the step definitions
cov = coverage.Coverage(source=["quorum_bdd", "tests.step_defs"])
cov.start()

# Run pytest on the unit tests
exit_code = pytest.main(["tests/unit/"])

# Stop coverage and generate report
cov.stop()
cov.save()

# Print report to console
cov.report(show_missing=True)

sys.exit(exit_code)
