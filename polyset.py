import sys

from polyset.polyset_runtime import DemoRunner


def main():
    """Run the assignment demo and print its report."""
    runner = DemoRunner()
    result = runner.run()
    for line in result.lines():
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
