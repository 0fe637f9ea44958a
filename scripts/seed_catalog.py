from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    # Allow running as: python scripts/seed_catalog.py
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from careerhub.database import Base, SessionLocal, engine  # noqa: E402
from careerhub.models import (  # noqa: E402
    CareerPath,
    CareerPathSkill,
    Course,
    EducatorProfile,
    JobPosting,
    Profile,
    RecruiterProfile,
    Skill,
)


def _load_json(path: Path) -> dict:
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("catalog must be a JSON object")
    return raw


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the demo catalog (skills, courses, paths, jobs, mentors).")
    parser.add_argument(
        "--catalog",
        default=str(Path(__file__).resolve().parents[1] / "careerhub" / "data" / "catalog.json"),
    )
    parser.add_argument("--truncate", action="store_true", help="Delete existing catalog rows before seeding")
    args = parser.parse_args(argv)

    Base.metadata.create_all(bind=engine)
    data = _load_json(Path(args.catalog))

    with SessionLocal() as db:
        if args.truncate:
            for model in (CareerPathSkill, JobPosting, RecruiterProfile, EducatorProfile, CareerPath, Course, Skill):
                db.query(model).delete()
            db.commit()

        inserted = {"skills": 0, "courses": 0, "career_paths": 0, "jobs": 0, "mentors": 0}

        skills_by_name: dict[str, Skill] = {}
        for item in data.get("skills", []):
            name = str(item.get("name") or "").strip()
            if not name:
                continue
            existing = db.query(Skill).filter(Skill.name == name).first()
            if existing is None:
                existing = Skill(name=name, category=item.get("category"), description=item.get("description"))
                db.add(existing)
                inserted["skills"] += 1
            skills_by_name[name.lower()] = existing
        db.flush()

        for item in data.get("courses", []):
            title = str(item.get("title") or "").strip()
            if not title or db.query(Course).filter(Course.title == title).first():
                continue
            db.add(Course(**{**item, "title": title}))
            inserted["courses"] += 1

        for item in data.get("career_paths", []):
            title = str(item.get("title") or "").strip()
            if not title or db.query(CareerPath).filter(CareerPath.title == title).first():
                continue
            required = item.pop("required_skills", []) or []
            path = CareerPath(**{**item, "title": title})
            db.add(path)
            db.flush()
            for req in required:
                skill = skills_by_name.get(str(req.get("skill") or "").strip().lower())
                if skill is None:
                    continue
                db.add(
                    CareerPathSkill(
                        career_path_id=path.id,
                        skill_id=skill.id,
                        importance_level=int(req.get("importance_level") or 1),
                    )
                )
            inserted["career_paths"] += 1

        for item in data.get("recruiters", []):
            recruiter = RecruiterProfile(company_name=item["company_name"], industry=item.get("industry"))
            db.add(recruiter)
            db.flush()
            for job in item.get("jobs", []):
                db.add(JobPosting(recruiter_id=recruiter.id, **job))
                inserted["jobs"] += 1

        for item in data.get("mentors", []):
            profile = Profile(full_name=item.get("full_name"), job_title=item.get("job_title"))
            db.add(profile)
            db.flush()
            db.add(
                EducatorProfile(
                    user_id=profile.id,
                    expertise_areas=list(item.get("expertise_areas") or []),
                    teaching_experience_years=item.get("teaching_experience_years"),
                    hourly_rate=item.get("hourly_rate"),
                    rating=float(item.get("rating") or 0),
                    total_students=int(item.get("total_students") or 0),
                    bio=item.get("bio"),
                )
            )
            inserted["mentors"] += 1

        db.commit()

    print("seeded:", inserted)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
