import uvicorn

from app.core import settings


def main():
    uvicorn.run(
        "app.server:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
    )

if __name__ == '__main__':
    main()
