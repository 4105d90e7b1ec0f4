from trajclass.cli.commands import app

app(prog_name="trajclass")
