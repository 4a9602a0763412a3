"""Point d'entrée du module. Permet python -m imdbchart."""

from imdbchart.etl.cli import main

if __name__ == "__main__":
    main()
