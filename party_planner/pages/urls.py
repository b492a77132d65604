PAGE_URL = "/"
ACTIONS_URL = "/actions"
