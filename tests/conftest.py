import os
import sys

import pytest

# Add src to PYTHONPATH for tests
PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
	sys.path.insert(0, SRC_DIR)


@pytest.fixture
def global_counter():
	from id_allocator import global_id_generator

	global_id_generator.teardown_global_counter()
	yield global_id_generator.init_global_counter()
	global_id_generator.teardown_global_counter()
