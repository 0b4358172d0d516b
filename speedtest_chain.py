import cProfile
import io
import pstats

from pebblechain import generate, generate_full

N = 2**16

def main():
	pebbles = generate(N, 0)
	chain = generate_full(N, 0)
	assert pebbles[-1].value == chain[-1]

if __name__ == "__main__":
	pr = cProfile.Profile()
	pr.enable()
	main()
	pr.disable()

	s = io.StringIO()
	sortby = 'tottime'
	ps = pstats.Stats(pr, stream=s)
	ps.sort_stats(sortby)
	ps.strip_dirs()
	ps.print_stats()
	print(s.getvalue())
