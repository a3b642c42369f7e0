import subprocess
import sys


def format_code():
    subprocess.run(["uv", "run", "ruff", "format", "."])


def lint():
    subprocess.run(["uv", "run", "ruff", "check", "."])


def lint_fix():
    subprocess.run(["uv", "run", "ruff", "check", "--fix", "."])


def check():
    subprocess.run(["uv", "run", "ruff", "check", "."])
    subprocess.run(["uv", "run", "ruff", "format", "--check", "."])


def test():
    subprocess.run(["uv", "run", "pytest", "-q"])


COMMANDS = {
    "format": format_code,
    "lint": lint,
    "fix": lint_fix,
    "check": check,
    "test": test,
}


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(f"Usage: python scripts.py [{'|'.join(COMMANDS)}]")
        sys.exit(1)

    command = COMMANDS.get(sys.argv[1])
    if command is None:
        print(f"Unknown command: {sys.argv[1]}")
        sys.exit(1)
    command()
