from typing import List, Sequence


def permute(numbers: Sequence[int]) -> List[List[int]]:
    # пустой вход -> пустой результат, а не [[]]
    permutations: List[List[int]] = []
    if len(numbers) == 0:
        return permutations

    _collect_permutations(numbers, 0, [], permutations)
    return permutations


def _collect_permutations(numbers, start, permutation, permutations):
    # вставляем numbers[start] во все позиции частичной перестановки
    if len(permutation) == len(numbers):
        permutations.append(permutation)
        return

    for i in range(len(permutation) + 1):
        new_permutation = list(permutation)
        new_permutation.insert(i, numbers[start])
        _collect_permutations(numbers, start + 1, new_permutation, permutations)
