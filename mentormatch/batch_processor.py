"""Batch ranking with concurrency"""
import os
import time
import json
from typing import List, Dict, Optional
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field

from .matching.engine import MatchingEngine
from .matching.models import MatchScore, UserPreferences
from .utils import config, logger, monitor


@dataclass
class ProcessingResult:
    """Result of ranking the pool for a single profile"""
    user_id: str
    success: bool
    latency: float
    matches: List[MatchScore] = field(default_factory=list)
    error: str = None


class BatchMatchProcessor:
    """Rank a candidate pool for many profiles concurrently.

    Scoring shares no mutable state across candidates, so each profile is
    one independent task.
    """

    MODES = ("best", "enhanced")

    def __init__(self, engine: MatchingEngine = None, max_workers: int = None, mode: str = "best"):
        if mode not in self.MODES:
            raise ValueError(f"Unknown batch mode: {mode}")
        self.engine = engine or MatchingEngine.from_config(config)
        self.max_workers = max_workers or config.batch_workers
        self.mode = mode

    @monitor.measure
    def _rank(self, profile: UserPreferences, candidates: List[UserPreferences], limit: int) -> List[MatchScore]:
        if self.mode == "enhanced":
            return self.engine.find_enhanced_matches(profile, candidates, limit)
        if profile.role == "mentee":
            return self.engine.find_best_matches(profile, candidates, limit)
        return self.engine.find_best_mentees(profile, candidates, limit)

    def process_profile(self, profile: UserPreferences, candidates: List[UserPreferences], limit: int) -> ProcessingResult:
        """Rank candidates for one profile, capturing any failure in the result"""
        start = time.perf_counter()
        try:
            matches = self._rank(profile, candidates, limit)
            return ProcessingResult(
                user_id=profile.id,
                success=True,
                latency=time.perf_counter() - start,
                matches=matches
            )
        except Exception as e:
            logger.error(f"Error ranking candidates for {profile.id}: {e}")
            return ProcessingResult(
                user_id=profile.id,
                success=False,
                latency=time.perf_counter() - start,
                error=str(e)
            )

    def process_batch(
        self,
        profiles: List[UserPreferences],
        candidates: List[UserPreferences],
        limit: int = None,
        output_dir: Optional[str] = None
    ) -> Dict:
        """Rank candidates for every profile; results keep input order"""
        limit = config.default_limit if limit is None else limit
        logger.info(f"Ranking {len(candidates)} candidates for {len(profiles)} profiles with {self.max_workers} workers")

        start_time = time.perf_counter()
        results: List[ProcessingResult] = [None] * len(profiles)

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            future_to_index = {
                executor.submit(self.process_profile, profile, candidates, limit): i
                for i, profile in enumerate(profiles)
            }

            for future in as_completed(future_to_index):
                result = future.result()
                results[future_to_index[future]] = result

                if result.success:
                    top = result.matches[0].overall_score if result.matches else 0
                    logger.info(f"✓ {result.user_id}: {len(result.matches)} matches, "
                                f"top={top:.2f}, {result.latency * 1000:.1f}ms")
                else:
                    logger.error(f"✗ {result.user_id}: {result.error}")

        total_time = time.perf_counter() - start_time

        successful = [r for r in results if r.success]
        failed = [r for r in results if not r.success]
        avg_latency = sum(r.latency for r in successful) / len(successful) if successful else 0
        throughput = len(successful) / (total_time / 60) if total_time > 0 else 0

        summary = {
            "total_profiles": len(profiles),
            "candidate_pool_size": len(candidates),
            "successful": len(successful),
            "failed": len(failed),
            "total_time_seconds": round(total_time, 3),
            "avg_latency_seconds": round(avg_latency, 4),
            "throughput_profiles_per_minute": round(throughput, 2),
            "results": [
                {
                    "user_id": r.user_id,
                    "success": r.success,
                    "latency": round(r.latency, 4),
                    "num_matches": len(r.matches),
                    "top_score": round(r.matches[0].overall_score, 4) if r.matches else None,
                    "error": r.error
                }
                for r in results
            ]
        }

        if output_dir:
            self._save(results, summary, output_dir)

        logger.info(f"Batch complete: {len(successful)}/{len(profiles)} succeeded in {total_time:.2f}s")
        return {"summary": summary, "results": results}

    @staticmethod
    def _save(results: List[ProcessingResult], summary: Dict, output_dir: str):
        os.makedirs(output_dir, exist_ok=True)

        for r in results:
            if not r.success:
                continue
            with open(os.path.join(output_dir, f"{r.user_id}.json"), "w") as f:
                json.dump([m.model_dump() for m in r.matches], f, indent=2)

        with open(os.path.join(output_dir, "processing_summary.json"), "w") as f:
            json.dump(summary, f, indent=2)

        logger.info(f"✓ Saved batch output to {output_dir}")
