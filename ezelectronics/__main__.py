# ezelectronics/__main__.py
import uvicorn

from ezelectronics.config import HOST, PORT


def main():
    uvicorn.run("ezelectronics.main:app", host=HOST, port=PORT)


if __name__ == "__main__":
    main()
