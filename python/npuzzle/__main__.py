from npuzzle.main import app

app(prog_name="npuzzle")
