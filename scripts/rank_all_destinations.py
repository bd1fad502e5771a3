import sys

from fixtures.archetype_answers import ARCHETYPES
from link.service import run_assessment


def rank_profiles(answers, catalog=None):
    return run_assessment(answers, catalog)


def main(archetype: str = "adventurer"):
    profile, results = rank_profiles(ARCHETYPES[archetype])

    print(f"\n===== DESTINATION RANKINGS ({archetype}) =====\n")
    print(f"Tribe: {profile.labels['tribe']}  |  Element: {profile.labels['dominant_element']}\n")

    for result in results:
        print(f"{result.rank:3d}. {result.destination_name}  |  FIT: {result.fit_score:.1f}  ({result.affinity_label})")
        print(f"     {result.best_for}")
        for dimension, value in result.breakdown.items():
            print(f"     {dimension:<17} {value:5.1f}")
        print(f"     note: {result.tension_note}\n")


if __name__ == "__main__":
    main(*sys.argv[1:2])
