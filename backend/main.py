from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI

from routes import agent

app = FastAPI(title="GitPet API", version="0.3.0")

app.include_router(agent.router)


@app.get("/")
def health():
    return {"status": "ok", "service": "gitpet"}
