from uitree.cli import app

app(prog_name="uitree")
