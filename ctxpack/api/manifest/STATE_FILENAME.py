STATE_FILENAME = "state.json"
