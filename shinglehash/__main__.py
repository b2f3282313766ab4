from shinglehash.cli.main import run

run()
