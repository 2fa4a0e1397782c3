from lighting.config import SceneConfig
from lighting.lightmap import LightMap
from lighting.occluder import Occluder, OccluderIndex
from lighting.scene import LightScene
from lighting.triangulation import fan_indices, fan_triangles
from lighting.visibility import Vertex, VisibilitySolver
