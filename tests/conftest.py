"""
Pytest fixtures for codeschema tests.
"""

import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# Add project root to path for codeschema imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from codeschema.ast import create_extractor  # noqa: E402


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def data_dir(temp_dir: Path, monkeypatch) -> Path:
    """Point CODESCHEMA_DATA_PATH at a temporary directory."""
    monkeypatch.setenv("CODESCHEMA_DATA_PATH", str(temp_dir))
    return temp_dir


@pytest.fixture
def java_extractor():
    return create_extractor("java")


@pytest.fixture
def python_extractor():
    return create_extractor("python")


@pytest.fixture
def csharp_extractor():
    return create_extractor("csharp")


@pytest.fixture
def js_extractor():
    return create_extractor("javascript")


@pytest.fixture
def calculator_java() -> str:
    """Java class with a documented method, a static factory and an override."""
    return '''public class Calculator {
    private int total;

    // Adds two integers.
    // Both operands are plain ints.
    // Overflow is not checked.
    // Returns the sum.
    public int add(int a, int b) {
        return a + b;
    }

    public static Calculator create() {
        return new Calculator();
    }

    @Override
    public String toString() {
        return "Calculator";
    }
}
'''


@pytest.fixture
def greeter_python() -> str:
    """Python module with a top-level function and a class."""
    return '''import os
from typing import Optional


def parse_args(argv):
    """Parse command-line arguments."""
    return argv[1:]


class Greeter:
    """Greets people by name."""

    def __init__(self, name: str, punctuation: str = "!"):
        self.name = name
        self.punctuation = punctuation
        label = name.upper()

    @staticmethod
    def shout(text):
        return text.upper()

    async def fetch(self, url, *args, **kwargs):
        if url:
            for item in args:
                while item:
                    item -= 1
        return None
'''


@pytest.fixture
def account_csharp() -> str:
    """C# class with a multi-declarator field and an auto-property."""
    return '''public class Account
{
    private int x, y, z;

    public string Owner { get; set; }

    public override string ToString()
    {
        return Owner;
    }

    public static Account Create()
    {
        return new Account();
    }
}
'''


@pytest.fixture
def counter_js() -> str:
    """JavaScript class with a field, a static method and an async method."""
    return '''import { log } from './log.js';

class Counter {
  count = 0;

  static create() {
    return new Counter();
  }

  async increment(step = 1) {
    let next = this.count + step;
    this.count = next;
    return next;
  }
}

/**
 * Adds two numbers.
 */
function helper(a, b) {
  return a + b;
}
'''
