"""Package entry point for ``python -m mobiledoc_converter``.

WHY: Users run the converter as ``python -m mobiledoc_converter post.json``.
Python's ``-m`` flag looks for ``__main__.py`` inside the package.

HOW: Delegates to the CLI's main() and exits with its return code.
"""

import sys

if __name__ == "__main__":
    from mobiledoc_converter.cli import main
    sys.exit(main())
