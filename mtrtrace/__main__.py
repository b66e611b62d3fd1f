"""
mtrtrace - structured mtr traceroute

Entry point for running as a module:
    python -m mtrtrace <target>
"""

from .cli import main

if __name__ == '__main__':
    main()
