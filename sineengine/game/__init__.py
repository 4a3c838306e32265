"""Example platformer game: two states, a player and the command that runs them."""