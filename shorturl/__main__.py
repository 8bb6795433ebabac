from shorturl.main import run

run()
