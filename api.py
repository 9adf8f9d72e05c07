from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException

from introspector.config import RunConfig
from introspector.errors import ConfigurationError
from introspector.model import ReportRequest, ReportResponse
from introspector.report import build_report, write_report


logger = logging.getLogger(__name__)

app = FastAPI(title="C# Project Introspector")


@app.post("/report", response_model=ReportResponse)
def report(req: ReportRequest) -> ReportResponse:
	try:
		config = RunConfig.from_inputs(req.root_path, req.entities_path, req.filter_pattern)
		result = build_report(config)
	except ConfigurationError as exc:
		raise HTTPException(status_code=400, detail=str(exc))

	output_path: Optional[str] = None
	if req.write:
		write_report(result, config.output_path)
		output_path = config.output_path
		logger.info("Report written to %s", output_path)
	return ReportResponse(markdown=result.render(), output_path=output_path)
