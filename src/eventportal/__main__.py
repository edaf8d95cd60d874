from eventportal.ui.cli import run

run()
