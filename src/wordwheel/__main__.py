"""Command-line interface."""
from wordwheel.main import main

if __name__ == "__main__":
    main()
