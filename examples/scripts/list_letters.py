letters = ["a", "b", "c"]
letters[:limit] if limit else letters
