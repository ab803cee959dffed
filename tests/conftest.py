import importlib.util
import sys
from pathlib import Path

root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(root))

import app  # noqa: E402

# app.py shares its name with the app/ package; load it as a submodule so
# tests can reach its helpers as ``app.<name>``.
spec = importlib.util.spec_from_file_location("app.app_module", root / "app.py")
app_module = importlib.util.module_from_spec(spec)
spec.loader.exec_module(app_module)
app.tag_rows = app_module.tag_rows
app.new_record_id = app_module.new_record_id
app.app_module = app_module
