"""Tests for the example scripts."""

import importlib.util
from pathlib import Path

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"


def load_example(name):
    spec = importlib.util.spec_from_file_location(name, EXAMPLES_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestSunflowerDemo:
    """Test the console demo."""

    def test_configures_logging(self, capsys, monkeypatch):
        """Test that the demo sets up logging before printing its report."""
        demo = load_example("sunflower_demo")
        calls = []
        monkeypatch.setattr(demo, "configure_logging", lambda: calls.append(True))

        demo.main()
        out = capsys.readouterr().out

        assert calls == [True]
        assert "Py-Sunflower Arrangement Demo" in out
        for mode in ("SUNFLOWER", "SUNFLOWERGEODESIC", "LATTICE"):
            assert f"{mode}:" in out
