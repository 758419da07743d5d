from __future__ import annotations
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Text
from .db import Base


# One table per document collection; each row is the JSON document for one user.

class UserDocument(Base):
	__tablename__ = "users"
	uid = Column(String(128), primary_key=True, index=True)
	payload_json = Column(Text, nullable=False)  # intake data
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
	updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class GameTranscript(Base):
	__tablename__ = "game_transcripts"
	uid = Column(String(128), primary_key=True)
	payload_json = Column(Text, nullable=False)  # conversation history + completion metadata
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
	updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class UserProfile(Base):
	__tablename__ = "user_profiles"
	uid = Column(String(128), primary_key=True)
	payload_json = Column(Text, nullable=False)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
	updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class CareerAdviceDocument(Base):
	__tablename__ = "career_advice"
	uid = Column(String(128), primary_key=True)
	payload_json = Column(Text, nullable=False)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
	updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class SkillAnalysisDocument(Base):
	__tablename__ = "skill_analysis"
	uid = Column(String(128), primary_key=True)
	payload_json = Column(Text, nullable=False)  # path title -> {analysis, createdAt}
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
	updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


COLLECTIONS = {
	"users": UserDocument,
	"gameTranscripts": GameTranscript,
	"userProfiles": UserProfile,
	"careerAdvice": CareerAdviceDocument,
	"skillAnalysis": SkillAnalysisDocument,
}
