#!/usr/bin/env python3
"""Start the Gable Roof Calculator API server."""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "roofcalc.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["roofcalc"],
        log_level="info",
    )
