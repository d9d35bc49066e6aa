import unittest

from patrones.core.flyweight import FlavorCache
from patrones.models import Flavor


class TestFlavorCache(unittest.TestCase):

    def setUp(self):
        """Cada prueba usa una cache nueva."""
        self.cache = FlavorCache()

    def test_lookup_repetido_retorna_misma_instancia(self):
        """
        Pedir el mismo nombre dos veces no crea un segundo sabor.
        """
        primero = self.cache.lookup("Espresso")
        tamano_tras_primero = self.cache.size()
        segundo = self.cache.lookup("Espresso")

        self.assertIs(primero, segundo)
        self.assertEqual(primero, segundo)
        self.assertEqual(self.cache.size(), tamano_tras_primero)

    def test_nombres_distintos_dan_sabores_distintos(self):
        frappe = self.cache.lookup("Frappe")
        espresso = self.cache.lookup("Espresso")

        self.assertNotEqual(frappe, espresso)
        self.assertEqual(self.cache.size(), 2)

    def test_tamano_igual_a_nombres_distintos(self):
        nombres = ["Cappuccino", "Frappe", "Cappuccino", "Espresso", "Frappe", ""]
        for nombre in nombres:
            self.cache.lookup(nombre)

        self.assertEqual(len(self.cache), len(set(nombres)))
        self.assertEqual(
            sorted(self.cache.list_flavors()),
            sorted(set(nombres))
        )

    def test_lookup_crea_sabor_con_el_nombre(self):
        flavor = self.cache.lookup("Mocha")

        self.assertEqual(flavor, Flavor("Mocha"))
        self.assertEqual(str(flavor), "Mocha")
        self.assertIn("Mocha", self.cache)
        self.assertNotIn("Latte", self.cache)

    def test_caches_independientes(self):
        otra = FlavorCache()
        a = self.cache.lookup("Latte")
        b = otra.lookup("Latte")

        self.assertEqual(a, b)
        self.assertEqual(otra.size(), 1)

    def test_log_de_creacion_con_contexto(self):
        with self.assertLogs('FlavorCache', level='DEBUG') as logs:
            self.cache.lookup("Latte")
            self.cache.lookup("Latte")

        self.assertEqual(
            logs.output,
            [
                "DEBUG:FlavorCache:Flyweight created: Latte | Context: {'total_flavors': 1}",
                "DEBUG:FlavorCache:Cache HIT: Latte",
            ]
        )

    def test_sabor_inmutable(self):
        flavor = self.cache.lookup("Latte")
        with self.assertRaises(AttributeError):
            flavor.name = "Otro"


if __name__ == '__main__':
    unittest.main()
