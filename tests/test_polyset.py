import importlib.util
import subprocess
import sys
from pathlib import Path
import uuid

from polyset.polyset_runtime import DemoRunner, DemoResult
from polyset.polyset_datatypes import MappingContainer, SequenceContainer

EXPECTED_LINES = [
    "dict:true",
    "d:'{foo: bar}'",
    "list:true",
    "l:'[1, bar]'",
]

def _load_driver_module():
    """Dynamically load the top-level polyset.py driver as a module with a unique name."""
    driver_path = Path(__file__).resolve().parents[1] / "polyset.py"
    mod_name = f"polyset_driver_for_test_{uuid.uuid4().hex}"
    spec = importlib.util.spec_from_file_location(mod_name, str(driver_path))
    mod = importlib.util.module_from_spec(spec)
    sys.modules[mod_name] = mod
    assert spec.loader is not None
    spec.loader.exec_module(mod)
    return mod

def test_runner_mutates_both_containers():
    result = DemoRunner().run()
    assert isinstance(result, DemoResult)
    assert result.mapping_ok is True
    assert result.sequence_ok is True
    assert isinstance(result.mapping, MappingContainer)
    assert isinstance(result.sequence, SequenceContainer)
    assert result.mapping == {"foo": "bar"}
    assert result.sequence == ["1", "bar"]

def test_runner_lines():
    assert DemoRunner().run().lines() == EXPECTED_LINES

def test_result_lines_report_failures():
    result = DemoResult(mapping=MappingContainer(), sequence=SequenceContainer(["1", "2"]))
    assert result.lines() == [
        "dict:false",
        "d:'{}'",
        "list:false",
        "l:'[1, 2]'",
    ]

def test_driver_main_prints_report(capsys):
    driver = _load_driver_module()
    assert driver.main() == 0
    out, err = capsys.readouterr()
    assert out.splitlines() == EXPECTED_LINES
    assert err == ""

def test_driver_process_exit_code():
    root = Path(__file__).resolve().parents[1]
    proc = subprocess.run(
        [sys.executable, str(root / "polyset.py")],
        cwd=str(root), capture_output=True, text=True,
    )
    assert proc.returncode == 0
    assert proc.stdout.splitlines() == EXPECTED_LINES
