"""Configuracion de patrones."""
