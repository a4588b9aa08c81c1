from broker_scraper.cli import main


main(prog_name='broker-scraper')
