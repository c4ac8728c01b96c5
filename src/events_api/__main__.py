from events_api.main import run

run()
