"""
Services around the simulation core: leaderboard (server and client side),
local player storage and game-over score reporting.
"""
