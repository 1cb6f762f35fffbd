import logging

from kickflip.app import TweenApp
from kickflip.settings import load_settings
from playground.scenes.chase import ChaseScene

def main():
    cfg = load_settings()
    logging.basicConfig(level=cfg.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = TweenApp(cfg, ChaseScene)
    app.run()

if __name__ == "__main__":
    main()
