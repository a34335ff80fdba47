from destructure.cli.app import app

app()
