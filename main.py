from melobot import Bot
from melobot.protocols.onebot.v11 import ForwardWebSocketIO, Adapter

from plugins.roll import RollPlugin

from dotenv import load_dotenv
load_dotenv()
import os
SOCKET_URL = os.getenv("SOCKET_URL", "ws://localhost:8080")
SOCKET_TOKEN = os.getenv("SOCKET_TOKEN", "")

if __name__ == "__main__":
    bot = (
        Bot("leafbot")
        .add_adapter(Adapter())
        .add_io(ForwardWebSocketIO(url=SOCKET_URL, access_token=SOCKET_TOKEN))
    )
    bot.load_plugin(RollPlugin)
    bot.run()
