import unittest

import numpy as np

from luo_simplicity.adapters.yeh_saliency_adapter import YehSaliencyAdapter
from luo_simplicity.config import SimplicityConfig, YehSaliencyConfig
from luo_simplicity.pipeline import ModifiedLuoSimplicity


def _square_on_gray(size: int = 40, start: int = 10, stop: int = 30) -> np.ndarray:
    image = np.full((size, size, 3), 0.5, dtype="float32")
    image[start:stop, start:stop] = (1.0, 0.0, 0.0)
    return image


class YehSaliencyAdapterTest(unittest.TestCase):
    def test_uniform_image_has_zero_saliency(self) -> None:
        adapter = YehSaliencyAdapter(YehSaliencyConfig())

        saliency = adapter.frequency_tuned_saliency(np.full((6, 6, 3), 0.3, dtype="float32"))

        self.assertEqual(saliency.shape, (6, 6))
        self.assertLess(float(saliency.max()), 1e-6)

    def test_outputs_cover_image(self) -> None:
        adapter = YehSaliencyAdapter(YehSaliencyConfig())
        image = _square_on_gray()

        outputs = adapter.compute(image)

        self.assertEqual(outputs.saliency_map.shape, (40, 40))
        self.assertEqual(sum(region.area for region in outputs.components), 40 * 40)
        self.assertTrue(all(value >= 0 for value in outputs.components.values()))

    def test_square_is_most_salient_region(self) -> None:
        adapter = YehSaliencyAdapter(YehSaliencyConfig())

        outputs = adapter.compute(_square_on_gray())

        top_region = max(outputs.components, key=outputs.components.get)
        top, left, bottom, right = top_region.bbox
        self.assertLessEqual(top, 15)
        self.assertLessEqual(left, 15)
        self.assertGreaterEqual(bottom, 25)
        self.assertGreaterEqual(right, 25)
        self.assertGreater(outputs.saliency_map[20, 20], outputs.saliency_map[0, 0])

    def test_uniform_image_scores_one(self) -> None:
        pipeline = ModifiedLuoSimplicity(SimplicityConfig())

        score = pipeline.extract(np.zeros((16, 16, 3), dtype=np.uint8))

        self.assertEqual(score, 1.0)

    def test_pipeline_scores_are_reproducible(self) -> None:
        image = (np.random.default_rng(2).random((24, 24, 3)) * 255).astype(np.uint8)
        pipeline = ModifiedLuoSimplicity(SimplicityConfig(saliency=YehSaliencyConfig(min_size=10)))

        first = pipeline.extract(image)
        second = pipeline.extract(image.copy())

        self.assertEqual(first, second)
        self.assertGreaterEqual(first, 0.0)
        self.assertLessEqual(first, 1.0)


if __name__ == "__main__":
    unittest.main()
