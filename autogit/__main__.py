from autogit.cli import app

app()
