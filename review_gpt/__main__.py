from review_gpt.cli.main import run

run()
