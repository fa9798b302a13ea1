import sys

from lc3dis.sample_runner import run_sample_program


def main() -> None:
    sys.exit(run_sample_program())


if __name__ == "__main__":
    main()
