from src.book_api.cli import app

app()
