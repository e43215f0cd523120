import os

import uvicorn

from calc_aposentadoria.api.app import create_app
from calc_aposentadoria.utils.logging.json_formatter import build_logger

app = create_app()

if __name__ == "__main__":
    build_logger("calc_aposentadoria")
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))
