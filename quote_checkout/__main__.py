from quote_checkout.main import run

run()
