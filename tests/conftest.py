import os
import tempfile

# Must run before ezelectronics is imported: the engine is built at import time
_tmp_dir = tempfile.mkdtemp(prefix="ezelectronics-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_tmp_dir, 'test.sqlite')}"
os.environ["SECRET_KEY"] = "test-secret-key"
