"""Package entry point for ``python -m wordlist_converter``.

WHY: Users run the converter as ``python -m wordlist_converter words.xml``.
Python's ``-m`` flag looks for ``__main__.py`` inside the package and
executes it.

HOW: Delegates to the CLI's main() function.
"""

if __name__ == "__main__":
    from wordlist_converter.cli import main
    main()
