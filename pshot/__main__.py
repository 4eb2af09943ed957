from pshot.cli.app import app

app(prog_name="pshot")
