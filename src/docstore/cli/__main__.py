from docstore.cli import app

app()
