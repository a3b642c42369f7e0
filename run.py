import os

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "admin_panel.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8001")),
        reload=os.getenv("RELOAD", "1").lower() in ("1", "true", "yes"),
    )
