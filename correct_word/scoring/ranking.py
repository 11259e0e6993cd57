from typing import List

from correct_word.models import ScoredCandidate


class Ranker:
    def rank(self, scored: List[ScoredCandidate], lower_is_better: bool) -> List[ScoredCandidate]:
        # A score égal, l'ordre d'origine est conservé (le premier gagne)
        if lower_is_better:
            return sorted(scored, key=lambda x: (x.score, x.index))
        return sorted(scored, key=lambda x: (-x.score, x.index))
