"""Domain routers: teams (``equipes``) and players (``joueurs``)."""
