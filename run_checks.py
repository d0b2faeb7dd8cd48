# run_checks.py
# Runs the pytest suite in a subprocess and prints a short pass/fail verdict.

import re
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).parent
PYTEST_ARGS = ["-q"]
OUTPUT_TAIL = 1800    # how much pytest output to echo back on failure

# pytest's closing line, e.g. "2 failed, 4 passed in 0.30s"
SUMMARY_RE = re.compile(r"^.*\bin [\d.]+s\b.*$", re.M)

def run_tests():
    """Run the suite with this interpreter from ROOT; return (all green, stdout+stderr)."""
    proc = subprocess.run(
        [sys.executable, "-m", "pytest", *PYTEST_ARGS],
        cwd=ROOT,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True
    )
    return proc.returncode == 0, proc.stdout

def parse_score(pytest_out: str) -> tuple[int, int, bool]:
    """
    Return (passed, failed, had_error) from the last summary line only;
    tracebacks printed above it may contain look-alike text.
    No summary line at all (pytest crashed) counts as an error.
    """
    summaries = SUMMARY_RE.findall(pytest_out)
    if not summaries:
        return 0, 0, True
    summary = summaries[-1]

    m_pass = re.search(r"(\d+)\s+passed", summary)
    m_fail = re.search(r"(\d+)\s+failed", summary)
    m_error = re.search(r"\d+\s+errors?\b", summary)

    passed = int(m_pass.group(1)) if m_pass else 0
    failed = int(m_fail.group(1)) if m_fail else 0
    return passed, failed, bool(m_error)

def main() -> int:
    ok, out = run_tests()
    passed, failed, had_error = parse_score(out)
    print(f"passed={passed}, failed={failed}, error={had_error}")

    if ok:
        print("✅ All tests passing.")
        return 0

    print("❌ Tests failing. Pytest output (tail):\n-----")
    print(out[-OUTPUT_TAIL:])
    return 1

if __name__ == "__main__":
    sys.exit(main())
