"""운정 실거래 모니터링 – API 서버 엔트리포인트"""

import uvicorn

from app.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        app_dir="backend",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
