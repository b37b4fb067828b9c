from assertcatch.cli import app

app(prog_name="assertcatch")
