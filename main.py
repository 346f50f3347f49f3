"""Run write-log from a checkout without installing: python main.py [MESSAGE ...]"""

from write_log.cli import main

if __name__ == "__main__":
    main()
