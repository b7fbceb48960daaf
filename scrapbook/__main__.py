from scrapbook.cli import cli

cli(prog_name="scrapbook")
