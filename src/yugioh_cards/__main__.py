from yugioh_cards.cli import run

run()
