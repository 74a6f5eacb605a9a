from contextlib import redirect_stdout
from io import StringIO
from pathlib import Path
from runpy import run_path
from unittest import TestCase

docs = Path(__file__).parents[3] / "docs"


class ExampleTests(TestCase):
    def test_heapExample(self) -> None:
        example = docs / "heap_example.py"
        if not example.exists():
            self.skipTest(f"{example} is not available")
        output = StringIO()
        with redirect_stdout(output):
            run_path(str(example), run_name="__main__")
        self.assertEqual(
            output.getvalue().splitlines(),
            [
                "no room: queue is full (capacity 3)",
                "9 fix outage",
                "5 review patch",
                "2 write report",
                "3",
            ],
        )
