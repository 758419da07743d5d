from __future__ import annotations
import json
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from .models import COLLECTIONS


class DocumentStore:
	"""get/set-by-key access to the per-user document collections."""

	def __init__(self, db: Session) -> None:
		self.db = db

	def _model(self, collection: str):
		try:
			return COLLECTIONS[collection]
		except KeyError:
			raise KeyError(f"Unknown collection: {collection}") from None

	def get(self, collection: str, uid: str) -> Optional[Dict[str, Any]]:
		row = self.db.get(self._model(collection), uid)
		if row is None:
			return None
		return json.loads(row.payload_json)

	def set(self, collection: str, uid: str, document: Dict[str, Any]) -> None:
		model = self._model(collection)
		payload = json.dumps(document, ensure_ascii=False)
		row = self.db.get(model, uid)
		if row is None:
			row = model(uid=uid, payload_json=payload)
			self.db.add(row)
		else:
			row.payload_json = payload
		self.db.commit()
