# pagekit/main.py
from dotenv import load_dotenv
load_dotenv()

from pagekit.app import create_app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
