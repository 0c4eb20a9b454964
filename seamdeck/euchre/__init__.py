"""Cards, packs, players and the game loop for four-player Euchre."""