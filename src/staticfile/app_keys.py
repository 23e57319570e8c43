"""Application keys for type-safe app configuration access."""

from aiohttp import web

from staticfile.chain import HandlerChain
from staticfile.config import Config

config_key = web.AppKey("config", Config)
chain_key = web.AppKey("chain", HandlerChain)
