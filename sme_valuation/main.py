import logging
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

load_dotenv()

# File + console logging; LOG_FILE and LOG_LEVEL come from the environment
log_file = os.getenv("LOG_FILE", os.path.join(os.path.dirname(__file__), "..", "logs.txt"))
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[
        logging.FileHandler(log_file, mode="a"),
        logging.StreamHandler(),
    ],
)
logger = logging.getLogger(__name__)

from sme_valuation.api.routes import router, reference_router
from sme_valuation.valuation.aggregator import WEIGHTS
from sme_valuation.valuation.reference_data import COMPANY_SIZES, SECTORS

cors_origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",") if o.strip()]

app = FastAPI(
    title="SME Valuation Engine",
    description="Multiples, DCF and asset-based valuation with an investment readiness score for SMEs",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
app.include_router(reference_router)

logger.info(
    f"SME valuation API ready: {len(SECTORS)} sectors, {len(COMPANY_SIZES)} size bands, "
    f"weights multiples={WEIGHTS.multiples}/dcf={WEIGHTS.dcf}/asset={WEIGHTS.asset}, CORS {cors_origins}"
)


@app.get("/")
async def root():
    return {
        "service": app.title,
        "version": app.version,
        "docs": "/docs",
        "valuations": router.prefix,
        "reference": f"{reference_router.prefix}/reference",
    }
