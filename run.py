# run.py

import uvicorn
from uadetect.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "uadetect.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        workers=1,
    )
