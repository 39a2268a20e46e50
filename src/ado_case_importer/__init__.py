"""Recovery of structured test cases from Azure DevOps test-case exports."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
