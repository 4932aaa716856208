from kmeans_parallel.Geometry.point import Point, as_points, distance, mean, nearest_index
