from rateconv.main import cli

cli()
